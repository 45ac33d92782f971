from forkscan.cli import main

main()
