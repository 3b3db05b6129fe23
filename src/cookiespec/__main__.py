from cookiespec.cli import main

main()
