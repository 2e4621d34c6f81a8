from people_api.main import run

run()
