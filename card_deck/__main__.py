from card_deck.ui.cli.cli_game import main

if __name__ == "__main__":
    main()
