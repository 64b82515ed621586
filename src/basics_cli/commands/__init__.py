"""Click commands registered on the ``basics`` group."""
