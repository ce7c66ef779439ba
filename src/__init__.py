"""Career Compass: match scoring, skill-gap analysis and learning roadmaps."""

__version__ = "0.1.0"
