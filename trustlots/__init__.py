"""trustlots — capital-gain lots for grantor trust gold ETF shareholders."""
