from httpcli.app import main

main()
