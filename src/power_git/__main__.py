from power_git.cli.cli import main

main()
