"""ドメイン層モジュール."""
