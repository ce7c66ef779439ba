"""Learning roadmaps, starter goals and career guides.

Public API:
    - RoadmapBuilder: Three-phase roadmap and starter goal generation
    - CareerGuideService: Full beginner career guide assembly
    - Roadmap, RoadmapPhase, StarterGoal, CareerGuide: Models
    - RoadmapConfig: Configuration settings
"""

from src.roadmap.builder import RoadmapBuilder
from src.roadmap.config import RoadmapConfig, get_roadmap_config, reset_roadmap_config
from src.roadmap.guide import CareerGuideService, infer_target_role
from src.roadmap.models import CareerGuide, Roadmap, RoadmapPhase, StarterGoal

__all__ = [
    "RoadmapBuilder",
    "CareerGuideService",
    "infer_target_role",
    "Roadmap",
    "RoadmapPhase",
    "StarterGoal",
    "CareerGuide",
    "RoadmapConfig",
    "get_roadmap_config",
    "reset_roadmap_config",
]
