from aemy.clients.wa import run

run()
