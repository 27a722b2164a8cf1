"""HTTP front end for the tracklog route pipeline."""
