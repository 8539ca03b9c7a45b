"""Services: comment fetching, document rendering, git."""
