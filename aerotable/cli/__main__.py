from aerotable.cli.main import main

main()
