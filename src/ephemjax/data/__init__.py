"""Data files bundled with ephemjax."""
