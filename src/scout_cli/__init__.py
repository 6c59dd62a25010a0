"""scout - command line for repository discovery and RAG search."""
