"""Students' tuition grant application system.

Records grant applications in memory, checks eligibility against GPA and
tuition-shortfall thresholds, and reports the shortlist and award tiers.
"""

__version__ = "1.0.0"
