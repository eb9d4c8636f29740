"""Console front end for the 21 engine."""
