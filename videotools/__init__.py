"""
This file marks the 'videotools' directory as a Python package.

Video Tools drives external command-line media tools (ffmpeg, ffprobe,
mkvmerge and mkvpropedit) as asynchronous subprocesses. The package is layered
the same way throughout:

- `config`: constants, message texts and the YAML user configuration.
- `domain`: enums, requests, results, exceptions and the MKV property model.
- `utils`: the tool resolver, the command builders and small helpers.
- `services`: the process runner, the outcome classifier, the progress
  listeners and one orchestrator per operation.

The command line entry point lives in `main.py` beside the package; argument
parsing is in `videotools.cli`.
"""
