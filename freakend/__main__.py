from freakend.cli import main

main()
