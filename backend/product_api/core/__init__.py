"""Cross-cutting application infrastructure: config, extensions, logging, errors."""
