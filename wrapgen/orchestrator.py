"""Pipeline orchestration for the analyze and generate flows."""

from __future__ import annotations

from pathlib import Path
from typing import List

from .config import WrapgenConfig
from .extractors import EventExtractor, VariantExtractor
from .git.fetch import SourceFetcher
from .logging import get_logger
from .models import Component, GenerationResult
from .render import IndexAggregator, WrapperGenerator, collect_exports
from .render.templating import Clock, create_environment, utc_now
from .walker import ComponentWalker
from .writer import OutputWriter


class Orchestrator:
    """Coordinates source acquisition, extraction, rendering and output."""

    def __init__(
        self,
        config: WrapgenConfig,
        *,
        walker: ComponentWalker | None = None,
        variant_extractor: VariantExtractor | None = None,
        wrapper_generator: WrapperGenerator | None = None,
        index_aggregator: IndexAggregator | None = None,
        fetcher: SourceFetcher | None = None,
        writer: OutputWriter | None = None,
        clock: Clock | None = None,
    ) -> None:
        self.config = config
        source = config.source
        output = config.output
        clock = clock or utc_now

        self.walker = walker or ComponentWalker(source.exclude_dirs)
        self.variant_extractor = variant_extractor or VariantExtractor(
            library_root=source.library_root,
            suffix=source.suffix,
            event_extractor=EventExtractor(suffix=source.suffix),
        )
        env = None
        if wrapper_generator is None or index_aggregator is None:
            env = create_environment(output.templates_dir)
        self.wrapper_generator = wrapper_generator or WrapperGenerator(
            design_system=output.design_system,
            library_label=output.library_label,
            clock=clock,
            env=env,
        )
        self.index_aggregator = index_aggregator or IndexAggregator(
            library_label=output.library_label,
            clock=clock,
            env=env,
        )
        self.fetcher = fetcher or SourceFetcher()
        self.writer = writer or OutputWriter(
            output.dir,
            component_filename=output.component_filename,
            index_filename=output.index_filename,
        )
        self.logger = get_logger("orchestrator")

    def analyze(self, source_root: Path) -> List[Component]:
        """Return every component under ``source_root`` that yields at least one variant."""
        self.logger.info("Analyzing component structure...")
        components: List[Component] = []
        for directory in self.walker.walk(source_root):
            variants = self.variant_extractor.extract(directory)
            if not variants:
                self.logger.debug("No variants found in %s", directory.name)
                continue
            components.append(Component(name=directory.name, variants=variants))
        self.logger.info("Found %d components to generate wrappers for", len(components))
        return components

    def generate(self, components: List[Component]) -> GenerationResult:
        """Write one wrapper module per component plus the aggregated index."""
        self.logger.info("Creating output directory structure...")
        result = GenerationResult(components=components)
        exported: List[Component] = []
        for component in components:
            text = self.wrapper_generator.render(component)
            path = self.writer.write_component(component.name, text)
            if path is None:
                continue
            result.written.append(path)
            exported.append(component)

        self.logger.info("Generating main index...")
        records = collect_exports(exported)
        result.index_path = self.writer.write_index(self.index_aggregator.render(records))
        return result

    def run(self, source_root: Path | None = None, *, keep_source: bool = False) -> GenerationResult:
        """Run the full pipeline, cloning the upstream repository when no source is given."""
        if source_root is not None:
            components = self.analyze(Path(source_root))
            return self.generate(components)

        source = self.config.source
        checkout = self.fetcher.clone(
            source.repo_url,
            source.work_dir,
            ref=source.ref,
            depth=source.clone_depth,
        )
        try:
            components = self.analyze(checkout)
            result = self.generate(components)
        finally:
            if not keep_source:
                self.fetcher.cleanup(checkout)
        self.logger.info("Generated components in %s", self.writer.output_dir)
        return result


__all__ = ["Orchestrator"]
