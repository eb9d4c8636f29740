"""Tests for the match controller."""

import pytest

from core.cards import Card, Rank, Suit
from core.rules import TableRules
from core.game.events import EventType
from core.game.match import MatchController

PLAYER_WINS = ([Card(Rank.KING, Suit.SPADES), Card(Rank.QUEEN, Suit.SPADES)],
               [Card(Rank.TEN, Suit.HEARTS), Card(Rank.EIGHT, Suit.HEARTS)])
DEALER_WINS = ([Card(Rank.KING, Suit.SPADES), Card(Rank.SEVEN, Suit.SPADES)],
               [Card(Rank.TEN, Suit.HEARTS), Card(Rank.NINE, Suit.HEARTS)])
TIE = ([Card(Rank.KING, Suit.SPADES), Card(Rank.QUEEN, Suit.SPADES)],
       [Card(Rank.TEN, Suit.HEARTS), Card(Rank.JACK, Suit.HEARTS)])


class Answers:
    """Play-again callback that records how often it was asked."""

    def __init__(self, *answers: bool, default: bool = True) -> None:
        self._answers = list(answers)
        self._default = default
        self.calls = 0

    def __call__(self) -> bool:
        self.calls += 1
        return self._answers.pop(0) if self._answers else self._default


@pytest.fixture
def make_match(stacked_deck, staying_player, events):
    """Factory for a match dealing the same hands every round."""

    def make(hands, ask_play_again, rules=None):
        deck = stacked_deck(*hands)
        return MatchController(
            staying_player,
            ask_play_again=ask_play_again,
            rules=rules,
            deck=deck,
            events=events,
        )

    return make


class TestMatchFlow:
    """Tests for match termination."""

    def test_player_reaches_grand_score(self, make_match):
        """Test the match stops at five wins without asking again."""
        answers = Answers()
        match = make_match(PLAYER_WINS, answers)
        summary = match.play()

        assert summary.grand_winner == "Alice"
        assert summary.grand_winner_role == "player"
        assert summary.player_score == 5
        assert summary.dealer_score == 0
        assert summary.rounds_played == 5
        assert match.round_num == 5
        assert answers.calls == 4

    def test_dealer_reaches_grand_score(self, make_match):
        """Test the dealer can take the match under quick rules."""
        match = make_match(DEALER_WINS, Answers(), rules=TableRules(grand_score=3))
        summary = match.play()

        assert summary.grand_winner == "Dealer"
        assert summary.grand_winner_role == "dealer"
        assert summary.dealer_score == 3
        assert summary.cash == -300
        assert summary.cash_outcome == "loss"
        assert summary.cash_amount == 300

    def test_player_named_dealer_grand_winner(self, stacked_deck, scripted_player, events):
        """Test the grand winner is reported by seat when both are called Dealer."""
        player = scripted_player(name="Dealer")
        match = MatchController(
            player,
            ask_play_again=Answers(),
            rules=TableRules(grand_score=2),
            deck=stacked_deck(*DEALER_WINS),
            events=events,
        )
        summary = match.play()

        assert match.grand_winner is match.dealer
        assert summary.grand_winner == "Dealer"
        assert summary.grand_winner_role == "dealer"
        assert summary.player_score == 0
        assert summary.cash_outcome == "loss"

    def test_player_declines(self, make_match):
        """Test saying no ends the match without a grand winner."""
        answers = Answers(True, False)
        match = make_match(PLAYER_WINS, answers)
        summary = match.play()

        assert summary.grand_winner is None
        assert summary.rounds_played == 2
        assert summary.player_score == 2
        assert summary.cash == 200
        assert summary.cash_outcome == "win"
        assert answers.calls == 2

    def test_ties_win_nothing(self, make_match):
        """Test a match of ties settles at zero."""
        match = make_match(TIE, Answers(True, True, False))
        summary = match.play()

        assert summary.rounds_played == 3
        assert summary.player_score == 0
        assert summary.dealer_score == 0
        assert summary.cash == 0
        assert summary.cash_outcome == "nothing"

    def test_scores_reset_at_match_start(self, make_match, staying_player):
        """Test leftover scores are cleared when a match begins."""
        staying_player.score = 4
        match = make_match(DEALER_WINS, Answers(False))
        match.dealer.score = 4
        summary = match.play()

        assert summary.player_score == 0
        assert summary.dealer_score == 1
        assert summary.grand_winner is None

    def test_history_keeps_every_round(self, make_match):
        """Test each round summary is kept in order."""
        match = make_match(PLAYER_WINS, Answers(True, False))
        match.play()

        assert [s.round_num for s in match.history] == [1, 2]
        assert [s.player.score for s in match.history] == [1, 2]

    def test_dealer_built_from_rules(self, staying_player):
        """Test the default dealer follows the table rules."""
        rules = TableRules(dealer_stands_on=15)
        match = MatchController(staying_player, ask_play_again=Answers(), rules=rules)
        assert match.dealer.stands_on == 15
        assert match.dealer.name == "Dealer"


class TestMatchEvents:
    """Tests for match-level events."""

    def test_grand_winner_and_end_events(self, make_match, events):
        """Test the match announces its grand winner and summary."""
        match = make_match(PLAYER_WINS, Answers(), rules=TableRules(grand_score=2))
        summary = match.play()

        grand = events.of_type(EventType.GRAND_WINNER)
        assert len(grand) == 1
        assert grand[0].data["participant"] == "Alice"
        assert grand[0].data["role"] == "player"

        settled = events.of_type(EventType.CASH_SETTLED)[0]
        assert settled.data == {"amount": 200, "outcome": "win"}

        ended = events.of_type(EventType.MATCH_ENDED)
        assert ended[0].data["summary"] == summary
        assert events.history[-1].event_type == EventType.MATCH_ENDED

    def test_reshuffle_between_rounds_only(self, make_match, events):
        """Test the deck is reshuffled before every round after the first."""
        match = make_match(PLAYER_WINS, Answers(True, True, False))
        match.play()

        assert len(events.of_type(EventType.ROUND_STARTED)) == 3
        assert len(events.of_type(EventType.DECK_RESHUFFLED)) == 2


class TestCash:
    """Tests for the cash outcome."""

    @pytest.mark.parametrize(
        "player_score,dealer_score,cash",
        [(5, 2, 300), (1, 5, -400), (3, 3, 0)],
    )
    def test_cash_from_scores(self, staying_player, player_score, dealer_score, cash):
        """Test cash is the score difference times 100."""
        match = MatchController(staying_player, ask_play_again=Answers())
        staying_player.score = player_score
        match.dealer.score = dealer_score
        assert match.cash == cash

    def test_cash_per_point_from_rules(self, staying_player):
        """Test the cash rate comes from the rules."""
        match = MatchController(
            staying_player,
            ask_play_again=Answers(),
            rules=TableRules(cash_per_point=25),
        )
        staying_player.score = 3
        assert match.cash == 75
