from microapp_scaffold.cli import main

main()
