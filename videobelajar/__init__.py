"""VideoBelajar course catalog API."""
