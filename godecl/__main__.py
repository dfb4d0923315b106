from godecl.cli import run

run()
