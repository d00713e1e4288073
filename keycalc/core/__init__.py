"""Calculator core: state variants, transitions, events."""
