"""GitHub: REST v3 client, repository and device-flow login."""
