"""GitHub Action running google-java-format on a repository and committing the result."""
