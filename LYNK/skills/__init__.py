"""Skills module."""

from LYNK.skills.skill import Skill
from LYNK.skills.title_skill import TitleSkill
from LYNK.skills.description_skill import DescriptionSkill
from LYNK.skills.tag_skill import TagSkill
from LYNK.skills.category_skill import CategorySkill

__all__ = [
    "Skill",
    "TitleSkill",
    "DescriptionSkill",
    "TagSkill",
    "CategorySkill",
]
