"""
GCS job runner

Host-side glue around the engine, mirroring a CI build step:

  • read the warnings, source list and GRP files from a workspace,
  • expand $VAR / ${VAR} in the project name and software version,
  • run the engine,
  • decide whether the surrounding job fails.

A missing input file is reported through the run's ingestion errors; it
fails the job only when fail_on_error is set.
"""

import logging
import os
import re
from dataclasses import dataclass, field
from string import Template
from typing import List, Mapping, Optional

from pydantic import BaseModel, ValidationError, field_validator

from .engine import ComplianceEngine, default_engine
from .errors import ConfigurationError, InvalidJobConfigError
from .models import RunRequest, RunResult, TextInput

logger = logging.getLogger(__name__)

# Logger whose records go to GcsJobConfig.log_file
_PACKAGE_LOGGER = "misra_gcs"


class GcsJobConfig(BaseModel):
    warnings_file: str
    source_list_file: str
    grp_file: Optional[str] = None
    warning_parser: str
    rule_set: str
    non_misra_tag_pattern: Optional[str] = None
    project_name: str = ""
    software_version: str = ""
    fail_on_error: bool = False
    fail_on_incompliance: bool = False
    log_file: Optional[str] = None

    @field_validator("warnings_file", "source_list_file", "warning_parser", "rule_set")
    @classmethod
    def _required(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Required")
        return value


def load_job_config(path: str) -> GcsJobConfig:
    """Read a GcsJobConfig from a JSON file."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = f.read()
    except OSError as e:
        raise InvalidJobConfigError(path, e.strerror or str(e))
    try:
        return GcsJobConfig.model_validate_json(raw)
    except ValidationError as e:
        raise InvalidJobConfigError(path, str(e))


def read_input(workspace_root: str, path: str, label: Optional[str] = None) -> TextInput:
    """Read a workspace file into a TextInput.

    Relative paths are resolved against *workspace_root*.  A file that
    cannot be read gives ``lines=None`` with the reason in ``error``.
    """
    label = label or path
    full = path if os.path.isabs(path) else os.path.join(workspace_root, path)
    try:
        with open(full, "r", encoding="utf-8", errors="replace") as f:
            content = f.read()
    except OSError as e:
        logger.error("File not found or unreadable: %s", full)
        return TextInput(label=label, error=f"{full}: {e.strerror or e}")

    if not content:
        logger.warning('"%s" is empty', full)
        return TextInput(label=label, lines=())
    # Keep physical line numbers so errors point at the right line
    return TextInput(label=label, lines=tuple(re.split(r"\r\n|\r|\n", content.rstrip("\r\n"))))


def expand_env(value: str, env: Mapping[str, str]) -> str:
    """Expand $VAR and ${VAR}; unknown variables are left as written."""
    return Template(value).safe_substitute(env)


@dataclass
class JobOutcome:
    result: Optional[RunResult]
    failed: bool = False
    messages: List[str] = field(default_factory=list)


class _LogFile:
    """Temporarily copy the package's log records into a file.

    The file is opened on construction, so an unwritable path raises
    OSError before the job starts.
    """

    def __init__(self, path: Optional[str]):
        self.path = path
        self.handler: Optional[logging.Handler] = None
        self._old_level = logging.NOTSET
        if path:
            self.handler = logging.FileHandler(path, mode="a", encoding="utf-8")
            self.handler.setFormatter(
                logging.Formatter(
                    "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S",
                )
            )

    def __enter__(self):
        if self.handler is None:
            return self
        pkg = logging.getLogger(_PACKAGE_LOGGER)
        self._old_level = pkg.level
        if pkg.getEffectiveLevel() > logging.INFO:
            pkg.setLevel(logging.INFO)
        pkg.addHandler(self.handler)
        return self

    def __exit__(self, *exc):
        if self.handler is not None:
            pkg = logging.getLogger(_PACKAGE_LOGGER)
            pkg.removeHandler(self.handler)
            pkg.setLevel(self._old_level)
            self.handler.close()
        return False


def run_job(
    config: GcsJobConfig,
    workspace_root: str,
    env: Optional[Mapping[str, str]] = None,
    engine: Optional[ComplianceEngine] = None,
) -> JobOutcome:
    """Run one GCS job in *workspace_root* and decide whether it failed."""
    env = os.environ if env is None else env
    engine = engine or default_engine()
    # Paths are made relative to an absolute root
    workspace_root = os.path.abspath(workspace_root)

    log_path = None
    if config.log_file:
        log_path = os.path.join(workspace_root, config.log_file)
    try:
        log_file = _LogFile(log_path)
    except OSError as e:
        msg = f"Cannot open log file {log_path}: {e.strerror or e}. Job failed."
        logger.error("%s", msg)
        return JobOutcome(result=None, failed=True, messages=[msg])

    with log_file:
        try:
            engine.check_compatibility(config.warning_parser, config.rule_set)
        except ConfigurationError as e:
            logger.error("%s. Job failed.", e)
            return JobOutcome(result=None, failed=True, messages=[f"{e}. Job failed."])

        grp = read_input(workspace_root, config.grp_file) if config.grp_file else None
        request = RunRequest(
            warning_parser=config.warning_parser,
            rule_set=config.rule_set,
            warnings=read_input(workspace_root, config.warnings_file),
            source_files=read_input(workspace_root, config.source_list_file),
            grp=grp,
            tag_pattern=config.non_misra_tag_pattern or None,
            workspace_root=workspace_root,
            project_name=expand_env(config.project_name, env),
            software_version=expand_env(config.software_version, env),
        )

        try:
            result = engine.run(request)
        except ConfigurationError as e:
            logger.error("%s. Job failed.", e)
            return JobOutcome(result=None, failed=True, messages=[f"{e}. Job failed."])

        outcome = JobOutcome(result=result)
        if result.error_code != 0 and config.fail_on_error:
            outcome.failed = True
            outcome.messages.append("Job failed because an error occurred during creation of the GCS")
        elif not result.is_compliant and config.fail_on_incompliance:
            outcome.failed = True
            outcome.messages.append("Job failed because the code is not MISRA compliant")

        for msg in outcome.messages:
            logger.error("%s", msg)
        return outcome
