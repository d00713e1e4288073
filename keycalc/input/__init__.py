"""Raw input → core event mapping."""
