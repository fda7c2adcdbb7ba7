from vspace.application.api.main import run

run()
