"""CLI for aem-dialog-gen."""

import argparse
import json
import logging
import os
import sys

from aem_dialog_gen.component_scanner import ComponentScanError, ComponentScanner
from aem_dialog_gen.dialog_assembler import generate_dialog_xml
from aem_dialog_gen.domain.models import GenerateOptions, GenerateResult, GenerationError
from aem_dialog_gen.generator_registry import GeneratorRegistry
from aem_dialog_gen.naming import NameAllocator, SequentialNameAllocator, TimestampNameAllocator
from aem_dialog_gen.output.dialog_writer import DialogWriter

logger = logging.getLogger(__name__)

LOG_FORMAT = '[aem-dialog-gen] %(message)s'


def _name_allocator(options: GenerateOptions) -> NameAllocator:
    return SequentialNameAllocator() if options.stable_names else TimestampNameAllocator()


def generate_dialogs(options: GenerateOptions) -> GenerateResult:
    """Main orchestration: component folders -> dialog configs -> dialog XML files.

    A failing component is recorded and logged; the others are still written.
    Progress messages are logged at INFO with ``verbose``, at DEBUG otherwise.

    Raises:
        ComponentScanError: The source folder does not exist.
    """
    progress = logging.INFO if options.verbose else logging.DEBUG
    logger.log(progress, "Starting generation of AEM dialogs...")

    scanner = ComponentScanner(options.dialog_file_name)
    writer = DialogWriter(options.target_dir, use_folder_structure=options.use_folder_structure)
    registry = GeneratorRegistry()

    components = scanner.scan(options.source_dir)
    logger.log(progress, "Found %d components", len(components))

    written_files: list[str] = []
    errors: list[GenerationError] = []

    for component in components:
        if not component.has_dialog:
            continue

        logger.log(progress, "Processing: %s", component.name)
        try:
            config = component.load_config()
            xml = generate_dialog_xml(config, component.name, names=_name_allocator(options), registry=registry)
            path = writer.write(component.name, xml)
        except Exception as e:
            errors.append(GenerationError(component=component.name, error=str(e)))
            logger.error("✗ Error processing %s: %s", component.name, e)
            continue

        written_files.append(path)
        logger.log(progress, "✓ Generated: %s", path)

    return GenerateResult(
        components_found=len(components),
        dialogs_written=len(written_files),
        errors_count=len(errors),
        target_dir=options.target_dir,
        written_files=written_files,
        errors=errors,
    )


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format=LOG_FORMAT,
        force=True,
    )


def main():
    parser = argparse.ArgumentParser(prog='aem-dialog-gen', description='AEM dialog XML generator')
    subparsers = parser.add_subparsers(dest='command')

    # generate command
    generate_parser = subparsers.add_parser('generate', help='Generate dialogs for every component')
    generate_parser.add_argument('source', help='Folder holding one sub-folder per component')
    generate_parser.add_argument('target', help='Components folder of the content package')
    generate_parser.add_argument('--dialog-file', default='dialog.json',
                                 help='Dialog config file name (default: dialog.json)')
    generate_parser.add_argument('--flat', action='store_true', help='Write _cq_dialog.xml instead of _cq_dialog/.content.xml')
    generate_parser.add_argument('--verbose', action='store_true', help='Log each component')
    generate_parser.add_argument('--timestamp-names', action='store_true',
                                 help='Name unnamed fields after the current time (legacy)')

    # render command
    render_parser = subparsers.add_parser('render', help='Print the XML for one dialog config')
    render_parser.add_argument('dialog', help='Path to a dialog JSON file')
    render_parser.add_argument('--component', help='Component name (default: parent folder name)')

    # types command
    subparsers.add_parser('types', help='List supported field types')

    args = parser.parse_args()

    if args.command == 'generate':
        _configure_logging(args.verbose)
        options = GenerateOptions(
            source_dir=args.source,
            target_dir=args.target,
            dialog_file_name=args.dialog_file,
            use_folder_structure=not args.flat,
            verbose=args.verbose,
            stable_names=not args.timestamp_names,
        )

        print(f"Generating dialogs from {args.source}...")
        try:
            result = generate_dialogs(options)
        except ComponentScanError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        print(f"Done! Wrote {result.dialogs_written} dialogs "
              f"for {result.components_found} components ({result.errors_count} errors)")
        print(f"Output: {result.target_dir}")

    elif args.command == 'render':
        if not os.path.isfile(args.dialog):
            print(f"Error: {args.dialog} not found", file=sys.stderr)
            sys.exit(1)

        component = args.component or os.path.basename(os.path.dirname(os.path.abspath(args.dialog)))
        with open(args.dialog, 'r', encoding='utf-8') as f:
            config = json.load(f)
        print(generate_dialog_xml(config, component))

    elif args.command == 'types':
        registry = GeneratorRegistry()
        for t in sorted(registry.get_supported_types()):
            print(f"  {t}")

    else:
        parser.print_help()


if __name__ == '__main__':
    main()
