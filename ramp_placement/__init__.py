"""
Ramp placement validation for aircraft cargo loading.

Converts augmented-reality world poses into discrete ramp slots, checks
each placement against the loading plan and the aircraft's per-slot
weight limits, and suggests the nearest valid slot when a placement fails.

Modules:
1. common      - Pose value type and rigid-body algebra
2. aircraft    - Aircraft profiles and the data-driven profile registry
3. geometry    - Slot identifiers and the ramp coordinate converter
4. planning    - Loading plan and plan text parser
5. evaluation  - Placement evaluator with occupancy tracking
6. session     - Ramp session controller used by the presentation layer
"""

__version__ = "0.1.0"
