"""
StepChains - Linear business scenarios with centralized failure handling

StepChains lets a call site express a multi-step scenario (service calls,
validations, conditional branches) as one readable chain instead of nested
try/except and if/else blocks. It provides:
- Scenario, a gate deciding once whether the chain runs at all
- Step, an immutable stage holding a value or a captured failure
- Combinators to validate, transform, branch, recover and dispatch errors
- Terminal operations resolving the chain to a value or a failure

Example:
    from stepchains import when, step

    order = (when(lambda: cart.items)
             .step(lambda: pricing.quote(cart), PricingUnavailable)
             .validate(lambda quote: quote.total > 0, EmptyOrder)
             .map(lambda quote: orders.place(quote))
             .on_error(PaymentDeclined, lambda e: notify(e))
             .or_none())

    size = step(lambda: int(raw)).recover(lambda e: 0).get()
"""

__version__ = "1.0.0"
__author__ = "StepChains Contributors"

from . import handlers
from .errors import EmptyStepError, ScenarioError
from .handlers import constant, log_and_recover, log_and_swallow, reraise, translate
from .result import Result
from .scenario import Scenario, raise_, run, step, when
from .step import Step

__all__ = [
    'Scenario',
    'Step',
    'Result',
    'ScenarioError',
    'EmptyStepError',
    'when',
    'step',
    'run',
    'raise_',
    'handlers',
    'translate',
    'reraise',
    'log_and_swallow',
    'log_and_recover',
    'constant',
]
