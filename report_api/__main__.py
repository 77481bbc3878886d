from report_api.main import run

run()
