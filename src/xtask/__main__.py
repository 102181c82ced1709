from xtask.cli import main

main()
