"""yag: manage pull requests (merge requests) of GitHub and GitLab from the command line."""

__version__ = "0.1.0"
