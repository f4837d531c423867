"""HTTP API server for the phonetic encoder."""
