from mudlog.cli import cli

cli(prog_name="mudlog")
