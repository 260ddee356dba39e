from bokmaal_gen.nlg.cli_frontend import main

if __name__ == "__main__":
    main()
