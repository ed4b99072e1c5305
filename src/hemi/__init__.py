"""
HEMI - High-Frequency Economic Momentum Index

HEMI answers one question only:
"Taken together, do five fast-moving indicators point to expansion or slowdown?"

Design Principles:
- Five indicators, fixed weights
- Percentile rank of the latest value within its own history
- Lower-is-better indicators are inverted
- Every cycle recomputed from scratch, no persistence
- Live data or a synthetic sample, never a mix of both
"""

__version__ = "1.0.0"
