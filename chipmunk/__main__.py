from chipmunk.repl import main

main()
