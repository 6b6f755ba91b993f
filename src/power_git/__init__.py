"""power-git CLI entry point.

This package provides a Click-based CLI that stores per-platform credentials
for GitHub, GitLab and Bitbucket and uses them to create remote repositories.
See `power-git --help` for details.
"""
