"""
caljd.engines.factory
---------------------
Transforms pure data specifications into live, executable Engine objects.
"""

from __future__ import annotations
from caljd.engines.calendar import CalendarEngine
from caljd.engines.fixed import FixedCalendarEngine
from caljd.engines.lilian import LilianCalendarEngine
from caljd.engines.mixed import MixedCalendarEngine
from caljd.engines.specs import EngineSpec, FixedCalendarParams, LilianParams, MixedCalendarParams


def make_engine(spec: EngineSpec) -> CalendarEngine:
    """The universal entry point."""
    if isinstance(spec.params, MixedCalendarParams):
        return MixedCalendarEngine(spec.params, kind=spec.kind)
    if isinstance(spec.params, LilianParams):
        return LilianCalendarEngine(spec.params)
    if isinstance(spec.params, FixedCalendarParams):
        return FixedCalendarEngine(spec.kind, spec.params)
    raise TypeError(f"Unknown calendar params type: {type(spec.params)}")
