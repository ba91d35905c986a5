"""Allocation strategies"""

from .direction_penalty import DirectionPenaltyStrategy

STRATEGIES = {
    'DirectionPenalty': DirectionPenaltyStrategy,
}

__all__ = ['DirectionPenaltyStrategy', 'STRATEGIES']
