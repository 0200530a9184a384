from toyrobot.cli.simulator import main_entry

main_entry()
