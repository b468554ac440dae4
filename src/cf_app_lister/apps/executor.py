"""Command executor - runs cf CLI commands via subprocess."""

import asyncio
import json
import os
from pathlib import Path
from typing import Protocol

import structlog
from pydantic import ValidationError

from cf_app_lister.apps.errors import UpstreamCallFailed
from cf_app_lister.apps.schemas import CloudControllerErrorSchema

logger = structlog.get_logger()

# Default timeout in seconds
DEFAULT_COMMAND_TIMEOUT = 60
CF_CONFIG_DIR = ".cf"
CF_CONFIG_FILE = "config.json"


class CommandExecutor(Protocol):
    """Capabilities the app lister needs from the cf CLI host."""

    async def get_api_endpoint(self) -> str:
        ...

    async def invoke_api(self, path: str) -> str:
        ...


class ExecutionResult:
    """Result of a command execution."""

    def __init__(
        self,
        success: bool,
        output: str,
        return_code: int | None = None,
        error: str | None = None,
    ):
        self.success = success
        self.output = output
        self.return_code = return_code
        self.error = error

    @property
    def failure_message(self) -> str:
        """Best description of why the command failed."""
        if self.error:
            return self.error
        if self.output.strip():
            return self.output.strip()
        return f"Command exited with status {self.return_code}"


def cloud_controller_error(payload: str) -> CloudControllerErrorSchema | None:
    """Return the error body if ``payload`` is a Cloud Controller error.

    Raises UpstreamCallFailed if the body looks like an error but does not
    fit the error schema.
    """
    try:
        data = json.loads(payload)
    except ValueError:
        return None

    if not isinstance(data, dict) or "resources" in data:
        return None
    if "error_code" not in data and "description" not in data:
        return None

    try:
        return CloudControllerErrorSchema.model_validate(data)
    except ValidationError as e:
        raise UpstreamCallFailed(f"Unrecognised Cloud Controller error: {payload.strip()}") from e


class CfCliExecutor:
    """Execute Cloud Controller calls through the cf CLI."""

    def __init__(
        self,
        cf_binary: str = "cf",
        cf_home: str | Path | None = None,
        command_timeout: int = DEFAULT_COMMAND_TIMEOUT,
    ):
        self.cf_binary = cf_binary
        self.cf_home = Path(cf_home) if cf_home else None
        self.command_timeout = command_timeout

    @property
    def config_path(self) -> Path:
        """Path of the cf CLI config file holding the targeted API."""
        home = self.cf_home
        if home is None:
            home = Path(os.environ.get("CF_HOME") or Path.home())
        return home / CF_CONFIG_DIR / CF_CONFIG_FILE

    async def get_api_endpoint(self) -> str:
        """Read the API endpoint the cf CLI is currently targeting."""
        config_path = self.config_path

        logger.debug("Reading cf config", config_path=str(config_path))

        try:
            with open(config_path, encoding="utf-8") as f:
                config = json.load(f)
        except FileNotFoundError:
            raise UpstreamCallFailed(
                f"cf config not found at {config_path}. Use 'cf login' first."
            )
        except ValueError as e:
            raise UpstreamCallFailed(f"Could not parse cf config {config_path}: {e}")
        except OSError as e:
            raise UpstreamCallFailed(f"Could not read cf config {config_path}: {e}")

        target = config.get("Target", "") if isinstance(config, dict) else ""
        if not target:
            raise UpstreamCallFailed(
                "No API endpoint set. Use 'cf login' or 'cf api' to target an endpoint."
            )

        return target

    async def invoke_api(self, path: str) -> str:
        """Run ``cf curl <path>`` and return the response body."""
        result = await self.run(["curl", path])

        if not result.success:
            raise UpstreamCallFailed(result.failure_message)

        error = cloud_controller_error(result.output)
        if error is not None:
            logger.error(
                "Cloud Controller returned an error",
                path=path,
                code=error.code,
                error_code=error.error_code,
            )
            raise UpstreamCallFailed(error.message)

        return result.output

    async def run(self, args: list[str]) -> ExecutionResult:
        """Run a cf CLI command with captured output."""
        cmd = [self.cf_binary, *args]

        logger.info("Executing command", cmd=" ".join(cmd))

        try:
            process = await asyncio.create_subprocess_exec(
                *cmd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                env=None,  # Inherit environment
            )

            try:
                stdout, stderr = await asyncio.wait_for(
                    process.communicate(),
                    timeout=self.command_timeout,
                )
            except asyncio.TimeoutError:
                process.kill()
                await process.wait()
                raise

            output = stdout.decode("utf-8", errors="replace")
            error_output = stderr.decode("utf-8", errors="replace").strip()

            success = process.returncode == 0

            logger.info(
                "Command completed",
                cmd=" ".join(cmd),
                success=success,
                return_code=process.returncode,
            )

            return ExecutionResult(
                success=success,
                output=output,
                return_code=process.returncode,
                error=None if success else (error_output or None),
            )

        except asyncio.TimeoutError:
            logger.error(
                "Command timed out",
                cmd=" ".join(cmd),
                timeout=self.command_timeout,
            )
            return ExecutionResult(
                success=False,
                output="",
                error=f"Command timed out after {self.command_timeout} seconds",
            )

        except FileNotFoundError:
            logger.error("cf CLI not found", cf_binary=self.cf_binary)
            return ExecutionResult(
                success=False,
                output="",
                error=f"cf CLI not found: {self.cf_binary}",
            )

        except OSError as e:
            logger.exception("Command execution failed", cmd=" ".join(cmd))
            return ExecutionResult(
                success=False,
                output="",
                error=str(e),
            )
