from src.matching_pairs_game.app.entrypoint import main

main()
