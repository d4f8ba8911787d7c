from cliphistory.main import main

main()
