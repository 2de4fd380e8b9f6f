from catalog_store.main import main


if __name__ == "__main__":
    main()
