from timecollector.main import main


main()
