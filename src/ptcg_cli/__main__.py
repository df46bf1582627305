from ptcg_cli.app import main

main()
