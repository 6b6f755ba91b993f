"""Per-provider remote repository creation.

Import from submodules:
- abc: ProviderClient, CreatedRepository
- github: GitHubClient
- gitlab: GitLabClient
- bitbucket: BitbucketClient
- factory: create_provider_client
"""
