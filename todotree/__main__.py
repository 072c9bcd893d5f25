from todotree.interfaces.cli.main import main

main()
