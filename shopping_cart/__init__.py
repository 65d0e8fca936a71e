"""ショッピングカートAPI."""
