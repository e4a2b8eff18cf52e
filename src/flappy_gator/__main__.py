from .flappy_client import main

main()
