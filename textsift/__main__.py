from .cleaner.clean import main

main()
