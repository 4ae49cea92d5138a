"""
Configuration Package for Video Tools.

This package centralizes the static configuration settings for the application.
By separating configuration from the application logic, flag values, message
texts and naming conventions can be adjusted without touching the code that
builds commands or supervises processes.

This package includes settings for:
- Common application settings like the logging format, outcome messages and
  the worker pool size.
- The user configuration loader (`config.user.yaml`), producing an immutable
  `AppConfig` that is threaded through to the tool resolver.
- Video and audio specific flag values and output naming conventions.
"""
