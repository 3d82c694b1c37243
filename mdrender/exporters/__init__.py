"""exporters for rendered markdown documents."""
