"""appdoctor - environment readiness checks for mobile app toolchains."""

__version__ = "0.1.0"
