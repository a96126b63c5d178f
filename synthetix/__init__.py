# MIT License
# Copyright (c) 2026 Franz Granlund
# See LICENSE file in the project root for full license information.

from .check import PASSED_MESSAGE, Check, against, debug, run_check, transaction
from .config import DEFAULT_CONFIG, ConfigError, EngineConfig, config_from_dict, load_config
from .expectations import (
    CompiledPattern,
    Expectation,
    LiteralPattern,
    NoResponseError,
    StatusClass,
    StatusRange,
    evaluate,
    expectation,
)
from .outcome import OutcomeReached, Status, critical, ok, report, unknown, warning
from .transport import Response, Transport, resolve
