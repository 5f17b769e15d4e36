from filetree.cli import main

main()
