"""Outbound HTTP gateway used by the provider clients.

Import from submodules:
- abc: HttpClient, HttpError
- real: RealHttpClient
- fake: FakeHttpClient
"""
