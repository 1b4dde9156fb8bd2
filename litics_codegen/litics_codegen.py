import logging

import click

from .pipeline import CodeGeneratorConfig, LiticsCodegenError, OutputMode, PipelineGenerator, TargetPlatform


@click.command()
@click.option("--namespace", "-n", default=None, type=str, help="Package (Kotlin) or module path (Python) of the generated files")
@click.option("--language", "-l", default="kotlin", type=click.Choice(["kotlin", "python"]))
@click.option("--platform", "-p", default=None, type=click.Choice([p.value for p in TargetPlatform]), help="Kotlin target, 'js' adds @JsExport")
@click.option("--config", "-c", default=None, type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.option(
    "--error-if-exists",
    is_flag=True,
    default=False,
    help="Fail instead of overwriting previously generated files",
)
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.argument("source", type=click.Path(resolve_path=True))
@click.argument("target", type=click.Path(file_okay=False, resolve_path=True))
def litics_codegen(namespace, language, platform, config, error_if_exists, verbose, source, target):
    """Generate tracking bindings from the event schemas in SOURCE into the TARGET directory."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    try:
        if config is not None:
            config = CodeGeneratorConfig.from_file(config)
        else:
            config = CodeGeneratorConfig()

        # CLI flags override the config file
        if namespace is not None:
            config.namespace = namespace
        if platform is not None:
            config.target_platform = TargetPlatform(platform)
        if error_if_exists:
            config.output.mode = OutputMode.ERROR_IF_EXISTS

        PipelineGenerator(config, language).write(source, target)
    except LiticsCodegenError as e:
        raise click.ClickException(str(e)) from e
