"""Testing – fakes for exercising configuration loading without AWS."""
from mp_config.testing.fakes import (
    FailingLoader,
    FakeAwsClient,
    FakeAwsSession,
    FakeStreamingBody,
    StaticLoader,
    client_error,
)

__all__ = [
    "FailingLoader",
    "FakeAwsClient",
    "FakeAwsSession",
    "FakeStreamingBody",
    "StaticLoader",
    "client_error",
]
