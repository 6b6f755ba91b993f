"""Local git repository initialization gateway.

Import from submodules:
- abc: LocalGit
- real: RealLocalGit
- fake: FakeLocalGit
"""
