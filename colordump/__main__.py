from colordump.cli import run

run()
