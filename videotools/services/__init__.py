"""
Services Package for the Video Tools Application.

This package contains the "service layer" of the application: the parts that
launch processes and give their results a meaning.

- **Process Runner (`ProcessRunner`):**
  Owns the worker pool. Launches one process per argument vector, drains its
  output channels concurrently and yields one future per invocation.

- **Outcome Classifier (`classify`):**
  Per-tool exit code policies, including the MKVToolNix convention of exit
  code 1 meaning "completed with warnings".

- **Operation Orchestrators (`VideoConverter`, `VideoSplitter`,
  `VideoClipsMerger`, `AudioExtractor`, `SubtitleExtractor`,
  `MkvPropertyEditor`, `MkvTrackRemover`):**
  Compose builders, runner and classifier into user-facing operations and make
  exactly one terminal notification per operation.

- **Logging Service (`LoggingProgressListener`, `ErrorLog`):**
  Console progress reporting through loguru and an optional plain-text record
  of failures.
"""
