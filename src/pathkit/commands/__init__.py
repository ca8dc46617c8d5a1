"""Command front-ends, one module per installed script."""
