from jdkres.cli.app import main

main()
