"""API層モジュール."""
