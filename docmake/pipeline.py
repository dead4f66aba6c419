"""Pipeline orchestration: clone, detect, render, build, publish, start."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Callable, List, Optional, Tuple

from .config import DocMakeConfig, load_config
from .credentials import Credentials, resolve_credentials
from .detect import (
    DatabaseDetector,
    StackDetector,
    detect_multi_service,
    detect_project,
    read_env_file,
)
from .engine import ContainerEngine
from .generator.base import UnsupportedStackError
from .generator.compose import ComposeRenderer
from .generator.dockerfile import DockerfileRenderer
from .git.clone import Cloner
from .logging import get_logger
from .models import ProjectMeta, TechStack
from .repo_scanner import RepoScanner

CredentialsProvider = Callable[[Optional[str], Optional[str]], Credentials]


@dataclass
class PipelineResult:
    """Outcome of a successful pipeline run."""

    repo_path: Path
    stack: TechStack
    meta: ProjectMeta
    images: List[str] = field(default_factory=list)
    artifacts: List[Path] = field(default_factory=list)
    pushed: bool = False
    started: bool = False


class Pipeline:
    """Runs each stage in order; the first failure aborts the run without rollback."""

    def __init__(
        self,
        cloner: Cloner | None = None,
        engine: ContainerEngine | None = None,
        database_detector: DatabaseDetector | None = None,
        credentials_provider: CredentialsProvider | None = None,
    ) -> None:
        self.cloner = cloner or Cloner()
        self.engine = engine or ContainerEngine()
        self.database_detector = database_detector or DatabaseDetector()
        self.credentials_provider = credentials_provider or resolve_credentials
        self.logger = get_logger("pipeline")

    def run(
        self,
        repo_url: str,
        *,
        username: str | None = None,
        password: str | None = None,
    ) -> PipelineResult:
        repo_path = self.cloner.clone(repo_url)
        self.logger.info("Repository available at %s", repo_path)

        config = load_config(repo_path)
        stack, meta = self.analyze(repo_path, config)

        # A marker file at the root means a single service, even with split dirs.
        layout = detect_multi_service(repo_path)
        if not stack.from_marker and layout.complete:
            self.logger.info("Split layout detected: %s", layout)
            return self._run_multi(
                repo_path,
                config,
                stack,
                meta,
                Path(str(layout.frontend_path)),
                Path(str(layout.backend_path)),
                username,
                password,
            )
        if not stack.supported:
            raise UnsupportedStackError(stack.primary)

        credentials = self.credentials_provider(username, password)
        image_name = self.image_name(credentials.username, repo_path, config)
        result = PipelineResult(repo_path=repo_path, stack=stack, meta=meta, images=[image_name])

        dockerfile = DockerfileRenderer(config.templates_dir).write(repo_path, stack, meta)
        result.artifacts.append(dockerfile)
        self.logger.info("Dockerfile written to %s", dockerfile)

        compose = ComposeRenderer(config.templates_dir)
        compose_path = compose.write(repo_path, compose.render(stack, meta, image_name))
        result.artifacts.append(compose_path)
        self.logger.info("Compose file written to %s", compose_path)

        self.engine.build_image(repo_path, image_name)
        self._publish(result, credentials, config)
        self._start(result, config)
        return result

    def analyze(self, repo_path: Path, config: DocMakeConfig) -> Tuple[TechStack, ProjectMeta]:
        """Detect stack, metadata, environment and database for *repo_path*."""
        scanner = RepoScanner(config.exclude_paths)
        stack = StackDetector(scanner).detect(repo_path)
        self.logger.info("Detected stack: %s%s", stack.primary, f" ({stack.framework})" if stack.framework else "")

        manifest = scanner.scan(repo_path)
        meta = detect_project(manifest, stack)
        self.logger.info("Entry file: %s, port: %s", meta.entry_file, meta.port)

        env, env_path = read_env_file(repo_path)
        meta = replace(meta, env=env, env_file_path=env_path)
        if env:
            self.logger.info("Detected .env keys: %s", ", ".join(env))

        meta = replace(meta, database=self.database_detector.detect(manifest))
        if meta.database.detected:
            self.logger.info("Detected database: %s", meta.database.type)
        return stack, meta

    @staticmethod
    def image_name(username: str, repo_path: Path, config: DocMakeConfig, suffix: str = "") -> str:
        name = (config.image.name or repo_path.name).lower()
        return f"{username}/{name}{suffix}:{config.image.tag}"

    def _run_multi(
        self,
        repo_path: Path,
        config: DocMakeConfig,
        stack: TechStack,
        meta: ProjectMeta,
        frontend_dir: Path,
        backend_dir: Path,
        username: str | None,
        password: str | None,
    ) -> PipelineResult:
        frontend_stack, frontend_meta = self.analyze(frontend_dir, config)
        backend_stack, backend_meta = self.analyze(backend_dir, config)

        credentials = self.credentials_provider(username, password)
        frontend_image = self.image_name(credentials.username, repo_path, config, "-frontend")
        backend_image = self.image_name(credentials.username, repo_path, config, "-backend")
        result = PipelineResult(
            repo_path=repo_path,
            stack=stack,
            meta=meta,
            images=[frontend_image, backend_image],
        )

        dockerfiles = DockerfileRenderer(config.templates_dir)
        result.artifacts.append(dockerfiles.write(frontend_dir, frontend_stack, frontend_meta))
        result.artifacts.append(dockerfiles.write(backend_dir, backend_stack, backend_meta))

        compose = ComposeRenderer(config.templates_dir)
        content = compose.render_multi(frontend_meta, backend_meta, frontend_image, backend_image)
        result.artifacts.append(compose.write(repo_path, content))
        self.logger.info("Wrote %s", ", ".join(str(path) for path in result.artifacts))

        self.engine.build_image(frontend_dir, frontend_image)
        self.engine.build_image(backend_dir, backend_image)
        self._publish(result, credentials, config)
        self._start(result, config)
        return result

    def _publish(self, result: PipelineResult, credentials: Credentials, config: DocMakeConfig) -> None:
        if not config.publish.push:
            self.logger.info("Publishing disabled; skipping login and push")
            return
        self.engine.login(credentials.username, credentials.password)
        for image in result.images:
            self.engine.push_image(image)
        result.pushed = True

    def _start(self, result: PipelineResult, config: DocMakeConfig) -> None:
        if not config.compose.start:
            self.logger.info("Local startup disabled")
            return
        self.engine.compose_up(result.repo_path)
        result.started = True
