from trails.main import main

main()
