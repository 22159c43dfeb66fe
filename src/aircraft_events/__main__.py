from aircraft_events.cli import main

main()
