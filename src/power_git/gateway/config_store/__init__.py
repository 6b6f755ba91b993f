"""Persistent provider credential store.

Import from submodules:
- types: ProviderRecord, ConfigDocument
- abc: ConfigStore
- real: RealConfigStore
- fake: FakeConfigStore
"""
