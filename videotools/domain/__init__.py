"""
This package contains the core domain models of the Video Tools application.

The domain layer describes the tools, formats, requests and results the
orchestration layer works with. It performs no I/O and starts no processes,
which keeps it trivially testable.

Modules:
    exceptions.py: The failure taxonomy (validation, launch, stream, tool,
                   parse) every orchestrator converts into one terminal
                   error notification.
    formats.py: Container formats, audio formats and MKV track types.
    tools.py: The external tools and their channel and exit-code policies.
    requests.py: Typed operation requests such as `TrackRemovalSpec`.
    results.py: `ExecutionResult` and the classified `Outcome`.
    properties.py: `MkvPropertyInfo`, parsed from mkvmerge's JSON output.
"""
