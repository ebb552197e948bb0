"""HomeSearch: property search page backed by RentCast with a sample-data fallback."""
