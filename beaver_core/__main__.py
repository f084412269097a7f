from beaver_core.cli import main

main()
