"""Keyframe tracks."""

from .keyframe import Keyframe, TimeResult, Animation, as_time
