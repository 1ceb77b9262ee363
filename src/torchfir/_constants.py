"""Constants and default design parameters."""

# Number of points in the direct DFT used for magnitude spectra
DFT_LENGTH: int = 256

# Default design parameters
DEFAULT_FILTER_CLASS: str = "lowpass"
DEFAULT_WINDOW_KIND: str = "rectangular"
DEFAULT_TAP_COUNT: int = 64
DEFAULT_SHIFT: int = 32
DEFAULT_SAMPLING_RATE: float = 1000.0
DEFAULT_LOW_CUT: float = 100.0
DEFAULT_HIGH_CUT: float = 300.0
