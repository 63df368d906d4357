from str_overlap.cli import run

run()
