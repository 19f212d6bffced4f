"""Alert output channels (file, program, stdout, syslog, queued responses), a timeout watchdog and a capture-stats writer."""

__version__ = "0.1.0"