from minimalcss.transforms.base import Transform
from minimalcss.transforms.merge import MergeTransform
from minimalcss.transforms.reachability import ReachabilityTransform
from minimalcss.transforms.usage import UsageSets, UsageTransform

__all__ = [
    "Transform",
    "MergeTransform",
    "ReachabilityTransform",
    "UsageSets",
    "UsageTransform",
    "apply_transforms",
]


def apply_transforms(stylesheet, transforms):
    """Apply *transforms* to *stylesheet* in order."""
    for t in transforms:
        stylesheet = t.apply(stylesheet)
    return stylesheet
