"""Console front end for the phone book."""
