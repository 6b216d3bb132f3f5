"""Related product recommendations over a co-purchase graph."""
