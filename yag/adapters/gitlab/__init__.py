"""Self-hosted GitLab: REST v4 client and repository."""
