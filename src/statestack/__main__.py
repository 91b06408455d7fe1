from statestack.main import main

main()
