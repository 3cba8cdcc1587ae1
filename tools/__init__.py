"""Watch-list tools and the JSON-backed catalog they write to."""
