from gtranslate.cli import main

main()
