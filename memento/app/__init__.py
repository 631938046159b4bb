"""Console front end for Memento."""
